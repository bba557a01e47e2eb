"""Services Layer — orchestrates core rules around injected repositories."""
