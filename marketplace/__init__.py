"""Marketplace backend: accounts, bearer tokens, and classified ads."""
