"""
GospelWise Author App export pipeline.

Turns planner projects (fiction / non-fiction) into branded PDF and
Word documents.
"""

__version__ = "0.1.0"
