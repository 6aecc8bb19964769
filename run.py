#!/usr/bin/env python3
"""
Easy startup script for the Term Translation API.
Checks the AWS configuration and runs the FastAPI server.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

def check_environment():
    """Check if environment is properly configured."""
    import boto3
    from config.settings import settings

    print("🔍 Checking environment...")

    issues = []

    if not settings.AWS_REGION:
        issues.append("❌ AWS_REGION not set")
    else:
        print(f"✅ AWS region configured: {settings.AWS_REGION}")

    if not settings.BEDROCK_MODEL_ID:
        issues.append("❌ BEDROCK_MODEL_ID not set")
    else:
        print(f"✅ Bedrock model configured: {settings.BEDROCK_MODEL_ID}")

    # Credentials come from the default AWS chain (env vars, profile, instance role)
    if boto3.Session(region_name=settings.AWS_REGION).get_credentials() is None:
        issues.append("❌ No AWS credentials found in the environment")
    else:
        print("✅ AWS credentials resolved")

    # Print configuration
    print(f"\n📊 Configuration:")
    print(f"  - Max tokens: {settings.BEDROCK_MAX_TOKENS}")
    print(f"  - Temperature: {settings.BEDROCK_TEMPERATURE}")
    print(f"  - Top P: {settings.BEDROCK_TOP_P}")
    print(f"  - Max terms per request: {settings.MAX_TERMS_PER_REQUEST}")

    if issues:
        print("\n⚠️  Issues found:")
        for issue in issues:
            print(f"  {issue}")
        print("\n💡 Please update your .env file or AWS configuration")
        return False

    print("\n✅ All checks passed!")
    return True


def main():
    """Main startup function."""
    from config.settings import settings

    print("=" * 80)
    print("🚀 Term Translation API")
    print("=" * 80)
    print()

    # Check environment
    if not check_environment():
        print("\n❌ Environment check failed. Please fix the issues above.")
        sys.exit(1)

    # Import and run FastAPI
    print("\n🌐 Starting FastAPI server...")
    print(f"📚 API Documentation will be available at: http://localhost:{settings.PORT}/docs")
    print(f"🔤 Translate endpoint: POST http://localhost:{settings.PORT}{settings.API_V1_PREFIX}/translate")
    print("\n" + "=" * 80)
    print()

    import uvicorn
    uvicorn.run(
        "src.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
