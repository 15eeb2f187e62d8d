"""mernkit -- scaffolds a MERN (MongoDB, Express, React, Node.js) project."""

__version__ = "1.0.0"
