"""Reference theme modules audited by default."""
