"""Run, verify and watch a course of small compiler exercises."""

__version__ = "5.2.1"