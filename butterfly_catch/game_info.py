"""
Butterfly Catch - Game Info

Game metadata and the command line arguments the launcher exposes.
"""

# Game metadata
NAME = "Butterfly Catch"
DESCRIPTION = "Catch butterflies with a net across ten levels, then face the queen."
VERSION = "1.0.0"

# CLI argument definitions, turned into argparse options by main.py
ARGUMENTS = [
    {
        'name': '--mode',
        'type': str,
        'default': None,
        'help': 'Game mode config file (without .yaml extension)'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'RNG seed for a reproducible game'
    },
    {
        'name': '--resolution',
        'type': str,
        'default': None,
        'help': 'Window resolution as WIDTHxHEIGHT (default: SCREEN_WIDTH x SCREEN_HEIGHT)'
    },
    {
        'name': '--fps',
        'type': int,
        'default': None,
        'help': 'Frame rate cap'
    },
    {
        'name': '--list-modes',
        'action': 'store_true',
        'help': 'List available game modes and exit'
    },
]
