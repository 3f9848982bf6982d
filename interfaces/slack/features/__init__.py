"""
Slack App Features

Extended Slack app capabilities:
- Workflows triggered from shortcuts and slash commands
"""

__all__ = []
