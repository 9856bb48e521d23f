"""Quoting and settlement gateway."""

from zenguess.engine.gateway import MarketGateway, build_gateway

__all__ = ["MarketGateway", "build_gateway"]
