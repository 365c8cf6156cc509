from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

from paperdrill_app import create_app

app = create_app()

if __name__ == '__main__':
    app.run(
        host=os.environ.get('HOST', '0.0.0.0'),
        port=int(os.environ.get('PORT', '5000')),
        debug=os.environ.get('APP_ENV', 'development') != 'production',
    )
