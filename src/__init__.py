"""
French Exam Question Search Package.

A small Python application that loads a spreadsheet of French exam questions
once and lets users search it with accent- and conjugation-tolerant matching,
through a Streamlit web interface.
"""

__version__ = "1.0.0"
