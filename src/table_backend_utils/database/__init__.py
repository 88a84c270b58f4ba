"""Schema/catalog scope: database reflection and schema query builders."""
