"""test fixtures for venvswitch."""
