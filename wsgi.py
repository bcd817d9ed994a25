# wsgi.py
from dotenv import load_dotenv; load_dotenv()

from wikigen import create_app

application = create_app()

if __name__ == "__main__":
    import os
    application.run(host="0.0.0.0", port=int(os.getenv("PORT", 3000)), debug=True)
