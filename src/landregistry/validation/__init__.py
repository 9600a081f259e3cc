"""Named field validators shared by request schemas."""
