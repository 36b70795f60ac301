"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- profile: Dietary profile stored in session state
- session: Session ID and current recipe batch
"""
