"""Decoder for BaseStation (SBS-1) aircraft surveillance feeds."""
