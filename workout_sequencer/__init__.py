"""
Workout Sequencer - Superset Round Sequencing Engine

Turns a workout plan (ordered exercise entries, some tagged into superset
groups) into a stream of executable steps. Standalone exercises run set by
set; grouped exercises run round-robin with rest only at round boundaries.
"""

__version__ = "0.1.0"
__author__ = "Workout Sequencer Team"
