"""Core enums and models shared by every layer."""
