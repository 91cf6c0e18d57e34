"""
Simulation - headless host for running the recorder outside the game.
"""

from .host import SimulatedHost, generate_rooms, random_seed_string
