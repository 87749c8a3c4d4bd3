"""Sauron core — configuration, logging and the error hierarchy."""
