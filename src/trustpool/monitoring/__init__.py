"""Text reports for pool state and settlements."""
