"""
Outbound integrations.

- slack_adapter: error alerts posted to a Slack incoming webhook (httpx)
"""
