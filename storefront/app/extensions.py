from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

# Extension objects (bound to an app in the factory)
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
