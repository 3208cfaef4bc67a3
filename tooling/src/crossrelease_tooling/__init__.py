"""crossrelease: build release artifacts for several Rust target triples in one run."""

__version__ = "0.1.0"
