"""Strategic voting under Approval Voting with runoff (Fishburn and Brams)."""

__version__ = "0.1.0"
