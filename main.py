"""Entry point for the Blog Header Image Service."""

if __name__ == "__main__":
    import uvicorn
    from app.core.config import settings

    print(f"🚀 Starting {settings.api_title} v{settings.api_version}")
    print(f"🖼️ Image model: {settings.gemini_image_model} ({settings.image_width}x{settings.image_height})")
    print(f"🔑 Gemini API key configured: {bool(settings.gemini_api_key)}")
    print(f"📝 Log level: {settings.log_level}")

    uvicorn.run(
        "app.main:app",  # Use string import for hot reload
        host="0.0.0.0",
        port=8000,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
