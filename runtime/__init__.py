"""Runtime support: configuration, clocks and ordered message delivery."""
