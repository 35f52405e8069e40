"""
External service integrations: Alertmanager (read) and GitHub team discussions (write).
"""
