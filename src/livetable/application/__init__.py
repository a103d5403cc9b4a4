"""Application layer – table view-state engine."""
