"""HTTP adapter exposing the showdown core as a JSON API."""
