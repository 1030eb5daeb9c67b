"""Shift Logger package.

Organized by feature modules (workers, shifts) with a thin Flask controller
layer over service/repository layers, plus a remote client and an
interactive console that talk to the HTTP service.
"""
