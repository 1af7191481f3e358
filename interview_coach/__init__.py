"""
Interview Coach - Resume-Driven Interview Practice Assistant

Reads a resume, infers the candidate's profile, builds tailored
question material and runs a turn-based coaching dialogue that checks
answers against keyword rubrics.
"""

__version__ = "0.1.0"
__author__ = "Interview Coach Team"
