"""Domain layer: pure business logic, imports nothing from other layers."""
