"""Quill - journaling backend with threaded comments."""
