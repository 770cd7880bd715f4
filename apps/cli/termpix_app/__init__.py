"""termpix command line application."""
