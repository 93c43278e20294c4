# Request envelopes (what callers send) and response envelopes (what they get back).
# Import from the submodules directly: errors.py depends on reconcile.
