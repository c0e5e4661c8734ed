"""Platform integrations such as logging."""
