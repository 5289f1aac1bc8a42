"""KeyForge Tk user interface."""
