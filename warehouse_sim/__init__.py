"""Step-based simulation of a volunteer-run warehouse: orders, customers, volunteers, actions and a command loop."""

__version__ = "0.1.0"
__all__ = ["order", "customer", "volunteer", "warehouse", "actions", "cli"]