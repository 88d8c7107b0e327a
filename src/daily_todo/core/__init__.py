"""
Core of the app: session state machine, key names, ports, errors, AppState.
"""
