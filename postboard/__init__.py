"""Postboard: users sign up, sign in and manage their own short text posts."""
