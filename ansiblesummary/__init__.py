"""Read ansible-playbook JSON reports and summarise task changes and per-host stats."""

__version__ = "0.1.0"
__all__ = ["__version__"]