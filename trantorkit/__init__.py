"""Building blocks for networked services: dates, log text, buffers, pools, encoding and hashing."""

__version__ = "1.5.26"