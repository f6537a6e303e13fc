"""
auth — User authentication module.

Provides:
  • Purpose-tagged, HMAC-signed bearer tokens (session / password reset)
  • Password hashing (bcrypt)
  • Register / Login / Profile / Password-reset API routes
  • ``get_current_user_id`` and ``require_role`` FastAPI dependencies
"""
