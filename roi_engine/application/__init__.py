"""Application layer: composition of projections for charting and export."""
