"""Export and submission adapters around calculation results."""
