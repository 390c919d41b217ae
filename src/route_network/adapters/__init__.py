"""
Adapter implementations for the Route Network.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, algorithms, and loading.
"""
