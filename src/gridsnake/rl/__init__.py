"""Headless environment and scripted policies for automated rounds."""
