"""Network administration API: VLAN records over REST, persisted to a JSON file."""
from netadmin.app import create_app

__all__ = ["create_app"]
