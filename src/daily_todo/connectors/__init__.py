"""
Terminal side of the app: raw keyboard, event thread, renderer, main loop.
"""
