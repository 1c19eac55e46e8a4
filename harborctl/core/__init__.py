"""Core services shared by every command: config, logging, errors, session."""
