"""Slack-facing interfaces."""
