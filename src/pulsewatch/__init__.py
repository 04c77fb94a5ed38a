"""Heart-rate monitoring session core: trend history, threshold alerts and simulated feeds."""
