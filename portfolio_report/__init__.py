"""Portfolio report package."""
