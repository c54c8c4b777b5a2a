"""
Adapter implementations for the Airline Router.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, algorithms, storage and output.
"""
