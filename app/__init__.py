"""Interactive frontend for the Personal Finance Tracker."""
