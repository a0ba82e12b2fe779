"""Pure tools used by the GridSchema session."""
