"""
Ward Bed Manager backend runner
"""

import uvicorn
from bedmanager.core.config import Config


def main():
    """Run the bed management backend server."""
    uvicorn.run(
        "bedmanager.api.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level=Config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
