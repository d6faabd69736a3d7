"""RoleGate - role-based access control core."""

__version__ = "0.1.0"
