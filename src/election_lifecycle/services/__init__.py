"""Service layer bridging snapshots, the lifecycle libraries, and response schemas."""
