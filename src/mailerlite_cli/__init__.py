"""mailerlite-cli — terminal dashboard and command-line client for MailerLite."""

__version__ = "0.3.0"
