"""Runtime configuration, logging and composition."""
