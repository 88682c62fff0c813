#!/usr/bin/env python3
"""
Sheet Form Builder - Main Entry Point
Supports both CLI mode and FastAPI server mode
"""

import argparse
import logging
import sys
import os

# Configuration
from sheetform.core.config import (
    AUTOMATION_CONFIG,
    GOOGLE_API_CONFIG,
    MENU_ITEM,
    MENU_TITLE,
    REQUEST_CONFIG,
    SHEET_CONFIG,
)

# Modular imports
from sheetform.core.system import FormBuilderSystem
from sheetform.utils.helpers import create_sample_sheet


def default_log_level(verbose: bool = None) -> int:
    """INFO when AUTOMATION_CONFIG['verbose'] is on, otherwise WARNING"""
    if verbose is None:
        verbose = AUTOMATION_CONFIG['verbose']
    return logging.INFO if verbose else logging.WARNING


# Setup logging
logging.basicConfig(
    level=default_log_level(),
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app():
    """Create FastAPI app"""
    from fastapi import FastAPI
    from sheetform.api.endpoints.forms import router as forms_router

    app = FastAPI(
        title="Sheet Form Builder API",
        description="API untuk membuat Google Forms dari data sheet CSV/Excel",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Include routers
    app.include_router(forms_router)

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint dengan informasi API"""
        return {
            "message": "Sheet Form Builder API",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "GET /forms/question-types/": "List supported question type tags",
                "POST /forms/build/": "Create a form from a CSV/Excel sheet",
                "POST /forms/preview/": "Preview a form from a JSON table (in memory)"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "Sheet Form Builder API"}

    return app


def run_cli_mode():
    """Run in CLI mode"""
    parser = argparse.ArgumentParser(
        description=f'Sheet Form Builder ({MENU_TITLE} → {MENU_ITEM})'
    )
    parser.add_argument('mode', choices=['build', 'api'], help='Execution mode')
    parser.add_argument('--file', '--csv', type=str, dest='file', help='Path to sheet file (CSV or XLSX)')
    parser.add_argument('--sheet', type=str, help='Sheet name inside an Excel workbook (default: first sheet)')
    parser.add_argument('--create-sample', action='store_true', help='Create sample sheet CSV')
    parser.add_argument('--dry-run', action='store_true', help='Build the form in memory, no Google Forms API calls')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    parser.add_argument('--host', type=str, default='0.0.0.0', help='API server host (for api mode)')
    parser.add_argument('--port', type=int, default=8000, help='API server port (for api mode)')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.create_sample:
        create_sample_sheet()
        return

    # API mode - start FastAPI server
    if args.mode == 'api':
        run_api_server(args.host, args.port)
        return

    if not args.file:
        logger.error("Sheet file required for build mode (CSV or XLSX)")
        return

    # Validate file extension
    file_ext = os.path.splitext(args.file)[1].lower()
    if file_ext not in SHEET_CONFIG['supported_extensions']:
        logger.error(f"Unsupported file format: {file_ext}. Please use CSV or XLSX files.")
        return

    if not os.path.exists(args.file):
        logger.error(f"File not found: {args.file}")
        return

    logger.info(f"📁 Sheet file: {args.file} ({file_ext.upper()})")

    # Initialize system
    system = FormBuilderSystem(
        GOOGLE_API_CONFIG,
        REQUEST_CONFIG,
        AUTOMATION_CONFIG['timezone'],
        dry_run=args.dry_run or AUTOMATION_CONFIG['dry_run'],
        notify=print
    )

    try:
        logger.info("🚀 Sheet Form Builder")
        logger.info("-" * 50)
        system.run_build(args.file, args.sheet)
    except KeyboardInterrupt:
        logger.info("⏹️ Stopping...")
    except Exception as e:
        logger.error(f"System error: {e}")


def run_api_server(host: str = "0.0.0.0", port: int = 8000):
    """Run FastAPI server"""
    try:
        import uvicorn

        app = create_app()

        logger.info("🚀 Starting Sheet Form Builder API Server")
        logger.info(f"📍 Server: http://{host}:{port}")
        logger.info(f"📚 Docs: http://{host}:{port}/docs")
        logger.info(f"🔄 ReDoc: http://{host}:{port}/redoc")
        logger.info("-" * 50)

        # Start server
        uvicorn.run(app, host=host, port=port)

    except ImportError as e:
        logger.error(f"❌ FastAPI dependencies not installed: {e}")
        logger.error("💡 Install with: pip install fastapi uvicorn python-multipart")
        sys.exit(1)
    except Exception as e:
        logger.error(f"❌ Failed to start API server: {e}")
        sys.exit(1)


def main():
    """Main entry point"""
    run_cli_mode()


if __name__ == "__main__":
    main()
