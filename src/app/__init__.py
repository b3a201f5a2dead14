"""Demo application built on the public core interface."""
