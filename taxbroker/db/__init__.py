from ._connection import DBConnection

(DBConnection,)
