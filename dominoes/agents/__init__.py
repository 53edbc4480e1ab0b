from dominoes.agents.base import Agent
from dominoes.agents.first_fit import FirstFitAgent
from dominoes.agents.random import RandomAgent

__all__ = [
    "Agent",
    "FirstFitAgent",
    "RandomAgent",
]
