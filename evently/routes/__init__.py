"""
FastAPI routers exposing the services over HTTP.
"""
