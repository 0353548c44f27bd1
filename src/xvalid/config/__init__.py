"""
xvalid configuration.
"""

from xvalid.config.messages import DEFAULT_MESSAGES, MessageTemplates

__all__ = ["MessageTemplates", "DEFAULT_MESSAGES"]
