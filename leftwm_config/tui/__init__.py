"""Interactive terminal editor for LeftWM configs."""
