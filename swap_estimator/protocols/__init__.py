"""
Protocol-specific quoting

Currently PancakeSwap Infinity on BSC.
"""
