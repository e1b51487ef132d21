"""Routing — alias resolution, URL generation, and the fallback route.

Resolver and generator are pure functions of (index snapshot, input)
and share one ``FallbackRoute`` so they stay symmetric.
"""
