"""Application services shared by several identity handlers."""
