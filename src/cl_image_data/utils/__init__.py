"""Utilities - digests, colour statistics, media types and attribute builders."""
