import os
import shutil
import tempfile
import unittest
from datetime import datetime, timedelta
from unittest.mock import patch


TEST_JWT_SECRET = "test-secret-key-with-enough-length-for-hs256"


class FakeMinio:
    def __init__(self):
        self.objects = {}
        self.removed = []
        self.fail_uploads = False

    def bucket_exists(self, bucket_name):
        return True

    def make_bucket(self, bucket_name):
        return None

    def fput_object(self, bucket_name, object_name, file_path, content_type=None):
        if self.fail_uploads:
            raise RuntimeError("storage down")
        with open(file_path, "rb") as f:
            self.objects[object_name] = {
                "bucket": bucket_name,
                "data": f.read(),
                "content_type": content_type,
            }

    def remove_object(self, bucket_name, object_name):
        self.removed.append(object_name)
        self.objects.pop(object_name, None)


class ApiTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)
        cls.staging_dir = tempfile.mkdtemp(prefix="postboard-test-")

        from postboard import create_app
        from postboard.db import db

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": TEST_JWT_SECRET,
            "PASSWORD_PEPPER": "TEST-PEPPER",
            "UPLOAD_STAGING_DIR": cls.staging_dir,
            "MINIO_BUCKET": "test-bucket",
            "MEDIA_PUBLIC_BASE_URL": "https://media.example.test/test-bucket",
            "LOG_LEVEL": "WARNING",
        })
        cls.db = db
        cls.client = cls.app.test_client()

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)
        shutil.rmtree(cls.staging_dir, ignore_errors=True)

    def setUp(self):
        with self.app.app_context():
            self.db.drop_all()
            self.db.create_all()

        self.fake_minio = FakeMinio()
        patcher = patch(
            "postboard.services.storage_service.get_minio_client",
            return_value=self.fake_minio,
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def _register(self, name="Alice", email="alice@example.com", password="secret123"):
        from postboard.services import auth_service

        with self.app.app_context():
            return auth_service.register(name, email, password).id

    def _token(self, email="alice@example.com", password="secret123"):
        from postboard.services import auth_service

        with self.app.app_context():
            return auth_service.login(email, password)["jwt"]

    def _auth_header(self, email="alice@example.com", password="secret123"):
        return {"Authorization": f"Bearer {self._token(email, password)}"}

    def _insert_post(self, author_id, title="A title", content="Some content",
                     image_id="image.png", created_at=None):
        from postboard.models.post_model import Post

        with self.app.app_context():
            post = Post(
                author_id=author_id,
                title=title,
                content=content,
                image_id=image_id,
                created_at=created_at or datetime.utcnow(),
            )
            self.db.session.add(post)
            self.db.session.commit()
            return post.id

    def _insert_posts(self, author_id, count, start=None):
        start = start or datetime(2025, 1, 1, 12, 0, 0)
        return [
            self._insert_post(
                author_id,
                title=f"post-{i}",
                image_id=f"image-{i}.png",
                created_at=start + timedelta(minutes=i),
            )
            for i in range(count)
        ]

    def _staged_files(self):
        if not os.path.isdir(self.staging_dir):
            return []
        return os.listdir(self.staging_dir)
