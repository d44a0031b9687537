"""Tablet hardware support helpers: message queue, GNSS target detection, config files, timers, lights, input power and board properties."""

__version__ = "0.1.0"