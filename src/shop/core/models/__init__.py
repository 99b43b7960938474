"""Core request/response models."""
