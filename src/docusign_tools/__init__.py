"""DocuSign eSignature client and CLI tools."""
