"""HTTP surface for the renocalc engine."""
