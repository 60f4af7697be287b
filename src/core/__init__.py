"""Core model components for the CHD microsimulation."""
