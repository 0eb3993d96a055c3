"""Green Groves: generic content repository for a gardening reference site."""

__version__ = "0.1.0"
