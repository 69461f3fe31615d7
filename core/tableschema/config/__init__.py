"""
Configuration resolution (command-line options, environment, settings file).
"""
