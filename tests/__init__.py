"""Tests for poseidon_spec."""
