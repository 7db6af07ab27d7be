"""
Experiments Module

Experiment configuration and operator assembly.

This module provides:
- YAML-based configuration loading
- Seed management for reproducibility
- Building mutation and crossover operators from configuration
"""

__version__ = "0.1.0"
