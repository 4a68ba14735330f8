"""Command line interface for abi-bindgen."""
