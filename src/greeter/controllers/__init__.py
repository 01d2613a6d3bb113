"""Controllers — objects the router dispatches matched requests to."""
