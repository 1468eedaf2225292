"""Walker trails and colour strips: a small generative sketch."""
