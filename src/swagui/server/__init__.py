"""ASGI glue between the raw protocol and swagui's Request/Response."""
