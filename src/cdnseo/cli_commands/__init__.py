"""CLI command modules. Importing a module registers its command on ``app``."""
