"""
schemas/ — Pydantic request/response models for the exercise API

Request models hold raw, unvalidated strings; field rules live in
services/validation.py so failures read as the API's plain-text sentences.
"""
