"""uPort identity document models.

IdentityDocument mirrors the legacy uPort profile JSON stored on IPFS. It can
be converted into a DID document keyed by a did:uport identifier.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

DID_CONTEXT = "https://w3id.org/did/v1"


class ImageObject(BaseModel):
    """Profile picture reference."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Optional[str] = Field(default=None, alias="@type")
    name: Optional[str] = None
    content_url: Optional[str] = Field(default=None, alias="contentUrl")


class IdentityDocument(BaseModel):
    """Identity profile registered for an MNID.

    Unknown keys are kept so that converting back to JSON loses nothing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    context: Optional[str] = Field(default=None, alias="@context")
    type: Optional[str] = Field(default=None, alias="@type")
    public_key: Optional[str] = Field(default=None, alias="publicKey")
    public_enc_key: Optional[str] = Field(default=None, alias="publicEncKey")
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[ImageObject] = None

    def to_did_document(self, did: str) -> "DIDDocument":
        """Convert the profile into a DID document for `did`.

        The signing key becomes #keys-1 and, when present, the encryption key
        becomes #keys-2. Everything else is carried in uportProfile.
        """
        public_keys: List[PublicKey] = []
        authentication: List[Authentication] = []
        if self.public_key is not None:
            public_keys.append(
                PublicKey(
                    id=f"{did}#keys-1",
                    type="Secp256k1VerificationKey2018",
                    owner=did,
                    public_key_hex=self.public_key.removeprefix("0x"),
                )
            )
            authentication.append(
                Authentication(
                    type="Secp256k1SignatureAuthentication2018",
                    public_key=f"{did}#keys-1",
                )
            )
        if self.public_enc_key is not None:
            public_keys.append(
                PublicKey(
                    id=f"{did}#keys-2",
                    type="Curve25519EncryptionPublicKey",
                    owner=did,
                    public_key_base64=self.public_enc_key,
                )
            )

        profile = self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"public_key", "public_enc_key"},
        )
        return DIDDocument(
            id=did,
            public_key=public_keys,
            authentication=authentication,
            uport_profile=profile,
        )


class PublicKey(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    owner: str
    public_key_hex: Optional[str] = Field(default=None, alias="publicKeyHex")
    public_key_base64: Optional[str] = Field(default=None, alias="publicKeyBase64")


class Authentication(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    public_key: str = Field(alias="publicKey")


class DIDDocument(BaseModel):
    """DID document derived from a uPort identity profile."""

    model_config = ConfigDict(populate_by_name=True)

    context: str = Field(default=DID_CONTEXT, alias="@context")
    id: str
    public_key: List[PublicKey] = Field(default_factory=list, alias="publicKey")
    authentication: List[Authentication] = Field(default_factory=list)
    uport_profile: Dict[str, Any] = Field(default_factory=dict, alias="uportProfile")
